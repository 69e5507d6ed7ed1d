# cadence/__main__.py
# Allow `python -m cadence`

from .cli import app

if __name__ == "__main__":
    app()
