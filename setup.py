from os import path

from setuptools import setup, find_packages


this_directory = path.abspath(path.dirname(__file__))
with open(path.join(this_directory, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()


setup(
    name='nvcd',
    description='Browser-like directory history for Neovim',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=find_packages(where='src'),
    version='0.0.1',
    license='MIT',
    python_requires='>=3.6',
    install_requires=[
        'pynvim>=0.3.2',
        'appdirs',
    ],
    extras_require={
        'test': ['pytest>=3.3.2'],
    },
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Text Editors',
        'Topic :: System :: Shells',
    ],
    package_dir={'': 'src'},
)
