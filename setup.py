import os
import pathlib
import sys

from setuptools import extension as setuptools_ext
from setuptools import setup
from setuptools.command import build_ext as setuptools_build_ext


_ROOT = pathlib.Path(__file__).parent


with open(str(_ROOT / "README.rst")) as f:
    readme = f.read()


with open(str(_ROOT / "shapenotation" / "_version.py")) as f:
    for line in f:
        if line.startswith("__version__ ="):
            _, _, version = line.partition("=")
            VERSION = version.strip(" \n'\"")
            break
    else:
        raise RuntimeError(
            "unable to read the version from shapenotation/_version.py"
        )


USE_MYPYC = False
MYPY_DEPENDENCY = "mypy>=0.910"
setup_requires = []
ext_modules = []

if (
    os.environ.get("SHAPENOTATION_USE_MYPYC", None) in {"true", "1", "on"}
    or "--use-mypyc" in sys.argv
):
    if "--use-mypyc" in sys.argv:
        sys.argv.remove("--use-mypyc")
    setup_requires.append(MYPY_DEPENDENCY)
    # Placeholder so that setuptools runs build_ext; finalize_options()
    # swaps in the extensions produced by mypycify.
    ext_modules.append(
        setuptools_ext.Extension(
            "shapenotation.foo", ["shapenotation/foo.c"]
        )
    )
    USE_MYPYC = True


class build_ext(setuptools_build_ext.build_ext):  # type: ignore
    def finalize_options(self) -> None:
        # finalize_options() may be called multiple times on the
        # same command object, so make sure not to override previously
        # set options.
        if getattr(self, "_initialized", False):
            return

        if USE_MYPYC:
            try:
                from mypyc.build import mypycify
            except ImportError:
                raise RuntimeError(
                    "please install {} to compile shapenotation "
                    "from source".format(MYPY_DEPENDENCY)
                )

            self.distribution.ext_modules = mypycify(
                [
                    "shapenotation/scanner.py",
                    "shapenotation/parser.py",
                ],
            )

        super(build_ext, self).finalize_options()


setup(
    name="shapenotation",
    version=VERSION,
    python_requires=">=3.8.0",
    license="MIT",
    author="The shapenotation authors",
    description="A pure-Python recursive-descent parser for the "
    "square/circle shape notation.",
    long_description=readme,
    long_description_content_type="text/x-rst",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries",
        "Topic :: Text Processing :: General",
    ],
    packages=["shapenotation", "shapenotation.tests"],
    package_data={"shapenotation": ["py.typed"]},
    install_requires=["mypy_extensions>=0.4.0"],
    setup_requires=setup_requires,
    ext_modules=ext_modules,
    extras_require={
        "test": [
            "flake8",
            MYPY_DEPENDENCY,
        ]
    },
    cmdclass={"build_ext": build_ext},
)
