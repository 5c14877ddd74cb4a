import math
import sys

from loguru import logger
import pytest

POINTS = [
    [0.7873616773923351, 0.8092306552000161],
    [0.21173326011754878, 0.6339482992398732],
    [0.01725675132713511, 0.9881718237619325],
    [0.5330575947747812, 0.9857357852889478],
    [0.5829186417619112, 0.5495024479309618],
    [0.3521920654953825, 0.9142557605053708],
    [0.3692810621902112, 0.08987228791660551],
    [0.7478009420313325, 0.3523304812577952],
    [0.5212182747402428, 0.41024277235906326],
    [0.6000844913877189, 0.3594561767427774],
    [0.21823414269097896, 0.8820946957442006],
    [0.4550299655344954, 0.6162078310693472],
    [0.17710113749892753, 0.006050443424864049],
    [0.744808216764824, 0.11893987805784223],
    [0.08517607238714664, 0.5755688995187869],
    [0.0311175093718834, 0.14680352435542987],
    [0.9406975842111823, 0.36328027015743847],
    [0.49042703806432253, 0.21626967830636024],
    [0.11508201721525246, 0.9030739711618478],
    [0.7212068364234988, 0.1843117185801686],
    [0.4720653136444348, 0.32004342948828035],
    [0.7285032162065087, 0.38694809427377175],
    [0.47187397860969094, 0.7384091109267817],
    [0.17896648902209567, 0.779927706301946],
    [0.2441719609991977, 0.8338028399022548],
    [0.6138092170178797, 0.096676922062096],
    [0.03926807017744294, 0.6405796332697564],
    [0.3597415915757063, 0.7480627116447116],
    [0.8332102156679112, 0.23308833651764094],
    [0.7571160739197182, 0.9997153582193037],
]

EXPECTED_RANKS = [
    0, 4, 1, 1, 1, 2, 4, 1, 2, 2,
    3, 3, 5, 2, 5, 6, 0, 3, 3, 2,
    3, 1, 2, 4, 3, 3, 5, 2, 1, 0,
]

EXPECTED_CROWDING = [
    0.13662144722870032,
    0.06705037798426683,
    math.inf,
    0.14120303635919387,
    0.23896401583642363,
    0.2083399165100112,
    0.1943926566786755,
    0.05299227965872994,
    0.20975561802766074,
    0.04447120104564087,
    0.10484084479780645,
    0.16985012321216233,
    math.inf,
    0.07134381421489303,
    0.14923007104520658,
    0.08962481535931327,
    math.inf,
    0.10231564880634747,
    0.13191234933490628,
    0.1941119008950743,
    0.1400935970439103,
    0.07281999655957663,
    0.12661602170405725,
    0.09906126589340619,
    0.2183924770512246,
    0.16041707402003105,
    0.16366716348478308,
    0.060289080229606086,
    0.2704837949183645,
    math.inf,
]

FRUITS = ["apples", "oranges", "wheat", "coconuts", "stuff", "grapes"]


@pytest.fixture(autouse=True)
def quiet_logger():
    """Keep loguru output at WARNING during tests."""
    logger.remove()
    logger.add(sys.stderr, level="WARNING")
    yield
    logger.remove()
