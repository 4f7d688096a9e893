"""Main"""

from rpn4py.scripts.convert import run

if __name__ == "__main__":
    run()
