from libbfc.exceptions import BFCError


class InvalidCellsSizeError(BFCError):
    def __init__(self, cells_size: object) -> None:
        self.cells_size = cells_size

    def __repr__(self) -> str:
        return f"""Invalid cells size `{self.cells_size}`!

Cells size is an number of bytes allocated as program memory
It must be an positive integer (e.g `4096`, `0x1000`)

{self.generic_error_name}"""
