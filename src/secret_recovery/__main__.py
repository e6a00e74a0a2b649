# SPDX-FileCopyrightText: 2025 secret-recovery contributors
# SPDX-License-Identifier: MIT

from .cli import main

main()
