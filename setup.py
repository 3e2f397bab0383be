import setuptools

try:
    description = open('README.md').read()
except IOError:
    description = 'Arbitrary precision Richardson extrapolation of sequences sampled at doubling indices.'

setuptools.setup(
    packages = setuptools.find_packages(exclude = ['tests', 'tests.*']),

    install_requires = ['mpmath', 'attrs'],
    extras_require = {'test': ['pytest']},
    entry_points = {
        'console_scripts': ['richardson = richardson.cli:main']
    },
    zip_safe = False,
    include_package_data = True,

    name = 'richardson',
    version = '0.0.1',
    description = 'Arbitrary precision Richardson extrapolation of sequences sampled at doubling indices.',
    long_description = description,
    long_description_content_type = 'text/markdown',

    license = 'MIT',
    platforms = ['any'],
    classifiers = [
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'Operating System :: OS Independent',
        'Topic :: Software Development',
        'Topic :: Scientific/Engineering :: Mathematics',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ]
)
