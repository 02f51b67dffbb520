#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from freelance_flow.config.loader import ConfigLoader
from freelance_flow.config.validation import ConfigValidator


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"🔍 Validating workflow configuration in {loader.config_dir}...")

    try:
        config = loader.merge_config()
    except Exception as e:
        print(f"❌ Error loading configuration: {e}")
        sys.exit(1)

    errors = ConfigValidator.validate_config(config)

    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        sys.exit(1)

    print(f"✅ Receipts: {config['receipts']['method']} -> {config['receipts']['output_path']}")
    print(f"✅ Logging: {config['logging']['level']}")
    print(f"\n🎉 All configuration validation passed!")
    sys.exit(0)


if __name__ == "__main__":
    main()
