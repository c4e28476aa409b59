"""
Installation setup for langsync
"""
import configparser
import pathlib

import setuptools

# Establish project directory
project_root: pathlib.Path = pathlib.Path(__file__).resolve().parent

# Read config details to determine version-ing
config_file = project_root.joinpath("langsync/resources/langsync.properties")
config = configparser.ConfigParser()
if config_file.is_file():
    config.read(str(config_file))


def read_requirements(file_name: str) -> list:
    """
    Read a requirements file, if able
    :param file_name: Requirements file in the project root
    :return: Requirement specifiers
    """
    requirements_file = project_root.joinpath(file_name)
    if not requirements_file.is_file():
        return []

    with requirements_file.open(encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip() and not line.startswith("#")]


setuptools.setup(
    name="langsync",
    version=config.get("Langsync", "version", fallback="1.0.0+fallback"),
    description="Scrapes translation providers' language lists and reports drift against a canonical language dictionary",
    long_description=project_root.joinpath("README.md").open(encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    license="MIT",
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python",
        "Topic :: Software Development :: Internationalization",
        "Topic :: Text Processing :: Linguistic",
    ],
    keywords=[
        "Google Translate",
        "ISO 639",
        "Languages",
        "Microsoft Translator",
        "Scraper",
        "Yandex",
    ],
    python_requires=">=3.9",
    packages=setuptools.find_packages(include=["langsync", "langsync.*"]),
    package_data={"langsync": ["resources/*.json", "resources/*.properties"]},
    include_package_data=True,
    install_requires=read_requirements("requirements.txt"),
    extras_require={"test": read_requirements("requirements_test.txt")},
    entry_points={"console_scripts": ["langsync=langsync.__main__:main"]},
)
