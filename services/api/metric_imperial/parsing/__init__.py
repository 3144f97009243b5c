from .measurement_parser import ParseError, find_unit_boundary, parse_quantity, parse_unit

__all__ = ["ParseError", "find_unit_boundary", "parse_quantity", "parse_unit"]
