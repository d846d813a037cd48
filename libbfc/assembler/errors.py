from libbfc.assembler.drivers import get_all_drivers
from libbfc.exceptions import BFCError
from libbfc.targets.target import Target


class NoAssemblerDriverError(BFCError):
    def __init__(self, target: Target) -> None:
        self.target = target

    def __repr__(self) -> str:
        return f"""No assembler driver for target `{self.target.triplet}`!

Tried to perform assembler step, but no suitable driver (assembler) found!

Possible solutions: Install suitable assembler (e.g GNU binutils)
Known drivers (may be missing on system): [{", ".join(d.name for d in get_all_drivers())}]

{self.generic_error_name}"""
