from setuptools import setup, find_packages

setup(
    name="openai-model-catalog",
    version="0.1.0",
    description="Typed catalog of OpenAI model identifiers",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pydantic>=2.0.0",
        "typing_extensions>=4.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0.0"],
    },
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
