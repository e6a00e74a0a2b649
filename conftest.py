# SPDX-FileCopyrightText: 2025 secret-recovery contributors
# SPDX-License-Identifier: MIT
#
# conftest.py: lets the test-suite run from a plain checkout
#   • src/ on sys.path so `import secret_recovery` works without install
#   • SECRET_RECOVERY_* overrides cleared before the policy is first loaded

from __future__ import annotations

import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if SRC.is_dir():
    sys.path.insert(0, str(SRC))

for _name in [n for n in os.environ if n.startswith("SECRET_RECOVERY_")]:
    del os.environ[_name]

