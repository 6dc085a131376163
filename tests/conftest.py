import pathlib
import sys

# Ensure the src directory is on the path for importing toolset_bridge directly
sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))
