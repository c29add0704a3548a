"""
Right hand rule
===============

The full visualization: a marker moving along a circle with its velocity
vector, a hand that turns along, and the angular displacement vector along
the rotation axis. Drag to orbit, scroll to zoom, right-drag to pan.
"""

import righthand


if __name__ == "__main__":
    print(__doc__)
    righthand.set_log_level("info")
    righthand.show()
