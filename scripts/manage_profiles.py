#!/usr/bin/env python3
"""
Terraform Cloud Profile Manager

Run the terraform-profile CLI from a source checkout without installing it.
"""

import sys
from pathlib import Path

# Add the parent directory to sys.path to import from terraform_profile
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
from terraform_profile.cli import main

if __name__ == "__main__":
    main()
