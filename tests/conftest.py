# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-12
# Updated: 2026-10-19
# Description: conftest.py
# -----------------------------------------------------------------------------

import os
import sys
from pathlib import Path

# keep unit runs self-contained: no Gradio mount, no log file
os.environ.setdefault("CASELIST_MOUNT_UI", "0")
os.environ.setdefault("CASELIST_LOG_TO_FILE", "0")

# add project root to sys.path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))
