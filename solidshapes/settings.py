# solidshapes global settings

# Reject zero/negative radius and extents at construction.
# Off by default: degenerate shapes are accepted and simply contain nothing
# (or a single point).
STRICT_DIMENSIONS = False

# Deepest allowed CompoundShape nesting. Queries recurse once per level,
# so this keeps them well under the interpreter recursion limit.
MAX_NESTING_DEPTH = 200
