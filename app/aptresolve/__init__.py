"""aptresolve - resolve and act on Debian package state.

Resolves requested package names (including virtual packages) to their
installed and candidate versions and drives apt-get actions from that state.
"""

__version__ = "0.1.0"
