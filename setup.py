# pylint:disable=all
"""
Release check list:
1. Change the version in textedit/__init__.py and setup.py.
2. Commit these changes with the message: "Release: VERSION"
3. Add a tag in git to mark the release: "git tag VERSION -m"Adds tag VERSION for pypi" "
   Push the tag to git: git push --tags origin master
4. Build both the sources and the wheel. Do not change anything in setup.py between
   creating the wheel and the source distribution.
   For the wheel, run: "python setup.py bdist_wheel" in the top level directory.
   For the sources, run: "python setup.py sdist"
5. Check that everything looks correct by uploading the package to the pypi test server:
   twine upload dist/* -r pypitest
   Check that you can install it in a virtualenv by running:
   pip install -i https://testpypi.python.org/pypi textedit
6. Upload the final version to actual pypi:
   twine upload dist/* -r pypi
"""
from io import open
from setuptools import find_packages, setup

setup(
    name="textedit",
    version="0.1.0",
    author="Sai Prasanna",
    author_email="sai.r.prasanna@gmail.com",
    description="Non-overlapping text edit sets that apply atomically to a document.",
    long_description=open("README.md", "r", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    keywords="text edits language server refactoring",
    license="Apache",
    packages=find_packages(exclude=["*.tests", "*.tests.*",
                                    "tests.*", "tests",
                                    "examples", "examples.*"]),
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[],
    extras_require={"test": ["pytest"]},
    tests_require=["pytest"],
    classifiers=[
          "Intended Audience :: Developers",
          "License :: OSI Approved :: Apache Software License",
          "Programming Language :: Python :: 3",
          "Topic :: Text Editors :: Text Processing",
    ],
)
