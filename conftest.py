# Make the flat 'arena' package importable when running pytest from a checkout
import sys, pathlib
root = pathlib.Path(__file__).resolve().parent
if (root / "arena").is_dir() and str(root) not in sys.path:
    sys.path.insert(0, str(root))
