from pastes_cli import __version__
from setuptools import find_packages
from setuptools import setup


def main():
    setup(
        name='pastes-cli',
        version=__version__,
        description='Upload files or text to pastes.dev or bytebin.lucko.me',
        packages=find_packages(exclude=('test*',)),
        install_requires=(
            'requests',
        ),
        extras_require={
            'testing': (
                'pytest',
            ),
        },
        classifiers=(
            'Programming Language :: Python :: 3',
            'Programming Language :: Python :: 3.10',
            'Programming Language :: Python :: 3.11',
        ),
        python_requires='>=3.10',
        entry_points={
            'console_scripts': [
                'pastes = pastes_cli.main:main',
            ],
        },
    )


if __name__ == '__main__':
    exit(main())
