import os

from setuptools import setup

if os.getenv("MYPYC_ENABLE", "").lower() in ["true", "t", "1"]:
    from mypyc.build import mypycify

    # Only the parser package is compiled; the command line tool stays interpreted.
    ext_modules = mypycify(["src/edl_tools/edl"])
else:
    ext_modules = []

setup(
    ext_modules=ext_modules,
)
