"""
Entry Point Script (Bootstrap)
==============================
Development runner for the application.

It is located outside the 'src' package and adds 'src' to 'sys.path', so the
window can be started without installing the package.

Usage:
    $ python run.py
"""
import sys
import os

# Add the 'src' directory to the Python path
current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

appid = 'WordCounter.Desktop'  # Arbitrary string
try:
    import ctypes
    ctypes.windll.shell32.SetCurrentProcessExplicitAppUserModelID(appid)
except (AttributeError, ImportError):
    # Not on Windows or ctypes not available
    pass

from wordcounter.main import main

if __name__ == "__main__":
    main()
