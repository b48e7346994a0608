"""
Simple example of docstring preconditions on a class and a function
"""

from pacts import PreconditionViolation, contract, pact


@pact
class Calculator:
    def add(self, a, b):
        """
        Add two integers

        @param int a
        @param int b
        """
        return a + b

    def divide(self, a, b):
        """
        Divide a by b

        @param float a
        @param float b
        @pre non_zero 2
        """
        return a / b

    def non_zero(self, value):
        return value != 0


@contract
def clamp(x, lo, hi):
    """
    Clamp x to [lo, hi]

    :param int x: Value
    :param int lo: Lower bound
    :param int hi: Upper bound
    """
    return max(lo, min(x, hi))


if __name__ == "__main__":
    calc = Calculator()
    print(f"add(2, 3) = {calc.add(2, 3)}")
    print(f"divide(1.0, 4.0) = {calc.divide(1.0, 4.0)}")
    print(f"clamp(12, 0, 10) = {clamp(12, 0, 10)}")

    for label, call in [("add(2, '3')", lambda: calc.add(2, "3")),
                        ("divide(1.0, 0.0)", lambda: calc.divide(1.0, 0.0))]:
        try:
            call()
        except PreconditionViolation as e:
            print(f"{label} rejected: {e}")
