from setuptools import setup, find_packages

setup(
    name="worktimer",
    version="1.0.0",
    packages=find_packages("src"),
    package_dir={"": "src"},
    include_package_data=True,
    install_requires=[
        "mcp>=1.6.0,<2",
        "pydantic>=2.0.0",
        "click>=8.0.0",
        "rich>=13.0.0",
        "pyyaml>=6.0.1",
        "python-dotenv>=1.0.0",
        "anyio>=4.0.0",
        "starlette>=0.27.0",
        "uvicorn>=0.23.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "worktimer=worktimer.cli:main",
        ],
    },
    python_requires=">=3.10",
)
