import os
import re

from setuptools import find_packages, setup

console_scripts = []
scriptpath = "keyaction_parser/cli"
for kascript in os.scandir(scriptpath):
    scriptname, ext = os.path.splitext(kascript.name)
    if not scriptname.startswith("ka") or ext != ".py":
        continue
    console_scripts.append(
        f"{scriptname} = {scriptpath.replace('/', '.')}.{scriptname}:main"
    )

with open("keyaction_parser/_package.py") as f:
    m = re.search(r'^__version__ = "([^"]+)"$', f.read(), re.MULTILINE)
    assert m is not None
    version = m.group(1)

setup(
    name="keyaction-parser",
    version=version,
    description="Lexer for keybinding actions: semicolon-separated operations with quoted arguments",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.7",
    extras_require={"test": ["pytest", "hypothesis"]},
    entry_points={"console_scripts": console_scripts},
)
