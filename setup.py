from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="pidfparser",
    version="0.1.0",
    python_requires=">=3.8",
    author="pidfparser contributors",
    install_requires=[
        "lxml>=4.4.0",
        "python-dateutil",
    ],
    extras_require={
        "test": ["pytest"],
    },
    description="A PIDF (RFC 3863) presence document parser and serializer",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    test_suite="tests",
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        "Topic :: Communications",
        "Topic :: Text Processing :: Markup :: XML",
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
    ],
    entry_points={
        "console_scripts": [
            "pidfctl = pidfparser.cli.__main__:main",
        ]
    },
)
