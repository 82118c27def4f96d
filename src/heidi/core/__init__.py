"""
Core value types, checksum arithmetic and contracts.

Everything here is pure and independent of any particular identifier
format; NHS and CHI specializations live in their own packages.
"""
