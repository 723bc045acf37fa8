# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import re
from collections import namedtuple

VersionInfo = namedtuple("VersionInfo", ["major", "minor", "micro", "releaselevel", "serial"])

__version__ = "1.2.0"

_release_levels = {"a": "alpha", "b": "beta", "rc": "candidate", "dev": "dev"}

_version_pattern = re.compile(
    r"^(?P<major>\d+)\.(?P<minor>\d+)\.(?P<micro>\d+)"
    r"(?:\.?(?P<releaselevel>a|b|rc|dev)(?P<serial>\d+))?$"
)


def parse_version(version):
    """Split a version string like '1.2.0' or '1.3.0rc1' into a VersionInfo.

    Raises ValueError for strings not on that form.
    """
    m = _version_pattern.match(version)
    if m is None:
        raise ValueError("Invalid version string: %r" % (version,))
    level = m.group("releaselevel")
    return VersionInfo(
        int(m.group("major")),
        int(m.group("minor")),
        int(m.group("micro")),
        _release_levels[level] if level else "final",
        int(m.group("serial") or 0),
    )


version_info = parse_version(__version__)
