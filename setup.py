from setuptools import setup, find_packages

setup(
    name="media-saver",
    version="0.1.0",
    description="Copy supported media files into a flat folder and work with HH:MM:SS durations",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pyyaml>=6.0",
        "pydub>=0.25.1",
        "audioop-lts; python_version>='3.13'",
        "moviepy>=2.0.0",
        "pillow>=10.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "media-saver=media_saver.cli:main",
            "media-durations=media_saver.cli:durations_main",
        ],
    },
)
