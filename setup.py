from setuptools import setup, find_packages

setup(
    name="tmuxsmith",
    version="0.1.0",
    description="Start and stop tmux sessions from declarative YAML project files",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "click>=8.0.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "black>=22.0.0",
            "flake8>=5.0.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "tmuxsmith=tmuxsmith.cli.main:main",
        ]
    },
    python_requires=">=3.8",
)
