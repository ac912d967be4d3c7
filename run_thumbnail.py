"""
run_thumbnail.py - CLI Entry Point

Forwards execution to the CLI defined in `src/album_thumbnail/cli.py`.

Usage:
    python run_thumbnail.py a.jpg b.jpg c.png d.gif --out thumb.jpg [options]

This wrapper allows you to run the tool directly without needing to
modify PYTHONPATH or install the project as a package.
"""
import sys
# Source code in src/ subdirectory
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

import album_thumbnail.cli as at_cli

if __name__ == "__main__":
    raise SystemExit(at_cli.main())
