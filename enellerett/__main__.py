# enellerett/__main__.py
from enellerett.adapters.api.main import run

if __name__ == "__main__":
    run()
