#!/usr/bin/env python3
"""
PCB Thermal Toolkit Launcher
============================

This script launches the PCB Thermal Toolkit graphical user interface.

Calculators:
- IPC-2221 trace width (dT based) with resistance and power loss
- Copper resistance vs temperature
- Thermal via array vertical conduction resistance

Usage:
------
    # From the project root directory:
    python run_pcb_thermal_toolkit.py

    # Log every calculation:
    python run_pcb_thermal_toolkit.py --debug

Requirements:
------------
- Python 3.9+
- tkinter (usually included with Python)
- numpy
- pandas
- matplotlib
"""

import argparse
import logging
import sys
from pathlib import Path

# -------------------------------------------------------------------------
# Path Configuration
# -------------------------------------------------------------------------

# Add the project root to the Python path
project_root = Path(__file__).parent.resolve()
sys.path.insert(0, str(project_root))

# -------------------------------------------------------------------------
# Main Entry Point
# -------------------------------------------------------------------------

def main():
    """
    Main function to launch the PCB Thermal Toolkit UI.

    This function:
    1. Validates that required dependencies are available
    2. Configures logging
    3. Creates and launches the PcbThermalUI application
    """
    parser = argparse.ArgumentParser(description="PCB Thermal Toolkit")
    parser.add_argument("--debug", action="store_true", help="Log every calculation")
    args = parser.parse_args()

    print("=" * 60)
    print("  PCB Thermal Toolkit")
    print("=" * 60)
    print()
    print("Initializing...")

    # Check for required dependencies
    try:
        import numpy
        import pandas
        import matplotlib
        print(f"  [OK] numpy {numpy.__version__}")
        print(f"  [OK] pandas {pandas.__version__}")
        print(f"  [OK] matplotlib {matplotlib.__version__}")
    except ImportError as e:
        print(f"\n[ERROR] Missing required dependency: {e}")
        print("\nPlease install dependencies using:")
        print("    pip install -e .")
        sys.exit(1)

    # Check for tkinter
    try:
        import tkinter
        print(f"  [OK] tkinter (Tcl/Tk {tkinter.TclVersion})")
    except ImportError:
        print("\n[ERROR] tkinter is not available")
        print("\nPlease install tkinter:")
        print("  Ubuntu/Debian: sudo apt-get install python3-tk")
        print("  Fedora: sudo dnf install python3-tkinter")
        print("  macOS: brew install python-tk")
        sys.exit(1)

    from src.pcb_thermal.logger import setup_logging
    setup_logging(logging.DEBUG if args.debug else logging.INFO)

    print()
    print("Launching PCB Thermal Toolkit UI...")
    print("-" * 60)

    try:
        from src.ui.pcb_thermal_ui import PcbThermalUI

        app = PcbThermalUI()
        app.run()

    except Exception as e:
        print(f"\n[ERROR] Failed to start UI: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
