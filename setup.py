import setuptools

install_requires = [
    "Babel",
    "bcrypt",
    "bleach",
    "blinker",
    "click",
    "Flask>=2.3",
    "Flask-Babel>=3.0",
    "Flask-Login",
    "Flask-Mail",
    "Flask-SQLAlchemy>=3.0",
    "Flask-WTF",
    "PyYAML",
    "pytz",
    "SQLAlchemy>=2.0",
    "WTForms",
]

tests_require = [
    "pytest",
    "pytest-xdist",
]

dev_requires = tests_require + [
    # For coverage
    "coverage",
    "pytest-cov",
    # Static code analysis
    "flake8",
    "nox",
]


def get_long_description():
    with open("README.rst") as fd:
        return fd.read()


setuptools.setup(
    # Metadata
    name="labbook",
    version="0.1.0.dev0",
    license="AGPL-3.0",
    description="Comments and owner notifications for a laboratory notebook, "
    "based on Flask and SQLAlchemy",
    long_description=get_long_description(),
    platforms="any",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Web Environment",
        "Intended Audience :: Science/Research",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Framework :: Flask",
    ],
    # Data
    packages=setuptools.find_packages(include=["labbook", "labbook.*"]),
    package_data={
        "labbook.core": ["default_logging.yml"],
        "labbook.services.auth": ["templates/login/*.html"],
    },
    include_package_data=True,
    zip_safe=False,
    python_requires=">=3.8",
    # Requirements & dependencies
    install_requires=install_requires,
    extras_require={
        "tests": tests_require,
        "dev": dev_requires,
    },
)
