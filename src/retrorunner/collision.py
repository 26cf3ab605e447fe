from collections import namedtuple

Box = namedtuple("Box", ["x", "y", "width", "height"])


def overlaps(a, b):
    """Axis-aligned overlap test for anything with x, y, width and height."""
    return (a.x < b.x + b.width and
            a.x + a.width > b.x and
            a.y < b.y + b.height and
            a.y + a.height > b.y)


def shrink(box, margin):
    return Box(box.x + margin, box.y + margin,
               box.width - margin * 2, box.height - margin * 2)


def horizontally_too_close(x1, w1, x2, w2, min_gap):
    """True if [x1, x1+w1] and [x2, x2+w2] come within min_gap of each other."""
    return x1 - min_gap < x2 + w2 and x1 + w1 + min_gap > x2
