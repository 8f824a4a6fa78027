import logging
import sys


def setup_logging(level=logging.INFO):
    """
    Configure the root logger for the game host.
    - One line per record with time, level and origin.
    - Output goes to stdout.
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s:%(lineno)d | %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,  # drop handlers from a previous call so records are not duplicated
    )
    logging.getLogger("procworld").setLevel(level)
