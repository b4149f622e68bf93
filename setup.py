from setuptools import setup, find_packages

setup(
    name="css-style-importer",
    version="1.0.0",
    packages=find_packages(),
    install_requires=[
        'aiofiles',
        'orjson',
        'colorama',
        'typing-extensions'
    ],
    extras_require={
        'tests': [
            'pytest',
            'pytest-cov',
        ],
    },
    entry_points={
        'console_scripts': [
            'css-style-importer=css_style_importer.cli:main',
        ],
    },
    python_requires='>=3.8',
    description="Converts CSS variables and selector blocks into paint and text styles",
    long_description=open('README.md').read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
