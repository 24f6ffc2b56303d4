from pathlib import Path

import setuptools


def load_requirements(filename: str) -> list[str]:
    requirements = []
    for line in Path(__file__).with_name(filename).read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        requirements.append(stripped)
    return requirements


setuptools.setup(
    name="land_odds",
    version="0.2",
    author="yochi",
    author_email="pedrogush@gmail.com",
    description="Exact hypergeometric odds of drawing lands in an opening hand",
    packages=["controllers", "services", "utils", "utils.constants"],
    py_modules=["main"],
    entry_points={"console_scripts": ["land-odds=main:main"]},
    classifiers=["Programming Language :: Python :: 3", "Operating System :: OS Independent"],
    python_requires=">=3.11",
    install_requires=load_requirements("requirements.txt"),
    extras_require={"test": load_requirements("requirements-dev.txt")},
)
