# Labels for loops, formatted with loop label number
CODEGEN_LOOP_BEGIN_LABEL = ".LB%d"
CODEGEN_LOOP_END_LABEL = ".LE%d"

# Symbol of zero-initialized memory blob with cells
CODEGEN_CELLS_SYMBOL = "cells"
