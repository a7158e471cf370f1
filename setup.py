"""Setup script for YouTube Module Renumberer."""

from setuptools import setup, find_namespace_packages

setup(
    name="youtubemodules",
    version="0.1.0",
    description="Renumber uploaded YouTube videos by module and copy them into a playlist",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src"),
    install_requires=[
        "google-api-python-client>=2.0.0",
        "google-auth>=2.0.0",
        "google-auth-oauthlib>=0.4.0",
        "python-dotenv>=0.19.0",
        "tqdm>=4.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "youtubemodules=youtubemodules.cli:main",
        ]
    },
)
