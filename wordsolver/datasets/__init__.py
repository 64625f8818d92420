from .word_bank import WordBank
from .io import read_word_file, write_word_file

__all__ = ["WordBank", "read_word_file", "write_word_file"]
