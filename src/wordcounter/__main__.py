"""
Run with: python -m wordcounter
"""
from wordcounter.main import main

if __name__ == "__main__":
    main()
