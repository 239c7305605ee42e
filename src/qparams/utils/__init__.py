from qparams.utils.sequence import append_sequence
from qparams.utils.strings import clean_strings, string_in_list

__all__ = ['append_sequence', 'clean_strings', 'string_in_list']
