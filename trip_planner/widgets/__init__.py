"""Form input widgets.

Each widget keeps a local draft and reports commits upward through a
callback; none of them touches the trip preferences directly.
"""

from .budget_field import BudgetField
from .date_field import DateField
from .destination import DELIMITER, DestinationEditor, tokenize
from .draft import BACKSPACE, ENTER, DraftField

__all__ = [
    "DraftField",
    "DateField",
    "BudgetField",
    "DestinationEditor",
    "tokenize",
    "DELIMITER",
    "ENTER",
    "BACKSPACE",
]
