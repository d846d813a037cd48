"""BF compiler toolchain.

Provides CLI driver over `libbfc` which compiles, assembles and links BF programs.
"""
