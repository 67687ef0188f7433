"""Setup configuration for review_turnaround"""

from setuptools import setup, find_packages

setup(
    name="gh-review-turnaround",
    version="0.1.0",
    description=(
        "CLI tool for GitHub pull request review turnaround: review request to "
        "review time, weekends excluded, as CSV."
    ),
    author="GH Review Turnaround Contributors",
    author_email="",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "requests>=2.28.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "black>=22.0",
            "flake8>=4.0",
            "mypy>=0.950",
        ],
    },
    entry_points={
        "console_scripts": [
            "gh-review-turnaround=review_turnaround.main:main",
        ],
    },
)
