import sys
from pathlib import Path

# Add project root and shared package to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))
sys.path.insert(0, str(project_root / "packages" / "python" / "common"))
