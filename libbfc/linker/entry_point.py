# Symbol that linker expects as executable entry point
LINKER_EXPECTED_ENTRY_POINT = "_start"
