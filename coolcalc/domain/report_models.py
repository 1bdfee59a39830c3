"""
Generic report document: a title plus ordered sections of labelled values
"""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class ReportItem:
    """Single labelled value row"""
    label: str
    value: str
    unit: str = ""
    is_highlighted: bool = False


@dataclass(frozen=True)
class ReportSection:
    title: str
    items: Tuple[ReportItem, ...] = ()


@dataclass(frozen=True)
class ReportDocument:
    """Export payload, built fresh for every export request"""
    title: str
    subtitle: str
    sections: Tuple[ReportSection, ...] = ()
    inputs: Tuple[ReportSection, ...] = ()

    @property
    def result_items(self) -> List[ReportItem]:
        return [item for section in self.sections for item in section.items]
