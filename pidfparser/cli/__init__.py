from .check_cmd import check_reg, check
from .format_cmd import format_reg, format_doc
