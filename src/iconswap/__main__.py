# src/iconswap/__main__.py
from iconswap.app import main

if __name__ == "__main__":
    main()
