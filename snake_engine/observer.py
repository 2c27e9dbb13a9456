from typing import Callable

# Receives one diagnostic line at a time, e.g. launch.debug_print
Observer = Callable[[str], None]


def quiet(message: str):
    pass
