"""
Shared fixtures: a host class documenting its preconditions
"""

import pytest

from pacts import Pact
from pacts.core.config import Settings


class PactTester(Pact):
    pact_settings = Settings()

    def add(self, a, b):
        """
        Adds two numbers

        @param int a First number
        @param int b Second number
        @return int
        """
        return a + b

    def divide(self, a, b):
        """
        Divides two numbers

        @pre is_number 1
        @pre not_zero 2
        """
        return a / b

    def scale(self, value, factor=2):
        """
        @param float value
        @pre positive 2
        """
        return value * factor

    def describe(self, item, label):
        """
        @param Widget item
        @param string label
        """
        return f"{label}: {item}"

    def undocumented(self, a):
        return a

    def is_number(self, value):
        return isinstance(value, (int, float)) and not isinstance(value, bool)

    def not_zero(self, value):
        return value != 0

    def positive(self, value):
        return value > 0


@pytest.fixture
def tester():
    return PactTester()
