from qbscript.reader.parser import Reader, parse, parse_all

__all__ = ["Reader", "parse", "parse_all"]
