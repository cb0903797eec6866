"""
Setup script for the task-manager package.
"""
from setuptools import setup, find_packages

setup(
    name="task-manager",
    version="0.1.0",
    description="Task tracking service with an HTTP JSON API and a command-line client",
    author="Task Manager Developers",
    author_email="dev@example.com",
    url="https://github.com/username/task-manager",
    packages=find_packages(include=["taskmanager", "taskmanager.*"]),
    install_requires=[
        "flask>=2.2.0",
        "click>=8.0.0",
        "gevent>=22.10.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "task-manager=taskmanager.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
