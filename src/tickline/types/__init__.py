"""Value types shared by the label search and the widgets."""

from tickline.types.axis import AxisQuery, AxisResult, LabelRange, LabelSet

__all__ = ["AxisQuery", "AxisResult", "LabelRange", "LabelSet"]
