from importlib import metadata
from urllib.request import urlopen


_conf_url = "https://raw.githubusercontent.com/inducer/sphinxconfig/main/sphinxconfig.py"
with urlopen(_conf_url) as _inf:
    exec(compile(_inf.read(), _conf_url, "exec"), globals())

copyright = "2026, taylorpoly contributors"
release = metadata.version("taylorpoly")
version = ".".join(release.split(".")[:2])

intersphinx_mapping = {
    "mpmath": ("https://mpmath.org/doc/current/", None),
    "numpy": ("https://numpy.org/doc/stable/", None),
    "python": ("https://docs.python.org/3/", None),
    "pytools": ("https://documen.tician.de/pytools/", None),
    "sympy": ("https://docs.sympy.org/latest/", None),
}

nitpick_ignore_regex = [
    ["py:class", r"symengine\.(.+)"],  # :cry:
]

sphinxconfig_missing_reference_aliases = {
    # taylorpoly
    "Taylor": "class:taylorpoly.Taylor",
    "Basic": "class:taylorpoly.symbolic.Basic",
}


def setup(app):
    app.connect("missing-reference", process_autodoc_missing_reference)  # noqa: F821
