from setuptools import setup, find_packages
import watfold


with open('readme.rst') as f:
    long_description = f.read()


setup(
    name='watfold',
    description="A preprocessor for WebAssembly text forms implemented in pure Python",
    long_description=long_description,
    version=watfold.__version__,
    include_package_data=True,
    packages=find_packages(exclude=["*.test.*", "test"]),
    python_requires='>=3.6',
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'watfold-unfold = watfold.cli.unfold:unfold',
        ]
    },
    license='BSD',
    classifiers=[
        'License :: OSI Approved :: BSD License',
        'Development Status :: 3 - Alpha',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Software Development :: Compilers',
        'Topic :: Software Development :: Pre-processors',
    ]
)
