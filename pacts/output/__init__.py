from .json_formatter import ConditionReportFormatter

__all__ = ["ConditionReportFormatter"]
