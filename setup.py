#!/usr/bin/env python3

from setuptools import find_packages, setup


# Loads _version.py module without importing the whole package.
def get_version_and_cmdclass(package_name):
    import os
    from importlib.util import module_from_spec, spec_from_file_location

    spec = spec_from_file_location("version", os.path.join(package_name, "_version.py"))
    module = module_from_spec(spec)
    spec.loader.exec_module(module)
    return module.__version__, module.get_cmdclass()


version, cmdclass = get_version_and_cmdclass("quadrule")

install_requires = [
    "numpy>=1.22",
    "scipy>=1.8",
]

extras_require = {
    "test": [
        "pytest",
        "pytest-cov",
        "pytest-xdist",
        "hypothesis",
    ],
    "dev": ["nox", "asv"],
}


setup(
    name="quadrule",
    description="One-dimensional quadrature rules: Gauss families, "
    "interpolatory and Hermite-cubic rules",
    version=version,
    python_requires=">=3.9",
    license="BSD",
    packages=find_packages(exclude=["benchmarks", "benchmarks.*"]),
    install_requires=install_requires,
    extras_require=extras_require,
    cmdclass=cmdclass,
)
