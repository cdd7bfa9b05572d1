from setuptools import setup, find_packages

setup(
    name="league-standings",
    version="0.1.0",
    description="Season standings, split records and clinch numbers computed from league game results",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pandas>=1.5.3",
        "requests>=2.31.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "league-standings=league_standings.main:main",
        ],
    },
)
