from setuptools import find_packages, setup

setup(
  name="frostauth",
  version="0.1.0",
  author="Frostauth developers",
  description="XEdDSA login keys for FROST multi-party signing ceremonies",
  long_description=open("README.md").read(),
  long_description_content_type="text/markdown",
  packages=find_packages(exclude=["tests", "tests.*"]),
  python_requires=">=3.9",
  classifiers=[
    "Programming Language :: Python :: 3",
    "License :: OSI Approved :: MIT License",
    "Operating System :: OS Independent",
  ],
  install_requires=[
    "pynacl>=1.4",
    "colorama>=0.4",
    "pyperclip>=1.8",
  ],
  extras_require={
    "test": ["pytest", "pytest-sugar", "pytest-mock", "coverage", "mypy", "bandit"],
    "dev": ["tox", "isort", "yapf"],
  },
  include_package_data=True,
  entry_points=dict(console_scripts=["frostauth = frostauth.__main__:main"],),
)
