import setuptools

setuptools.setup(
    name='cliargs',
    version='0.1',
    license='MIT',
    zip_safe=False,
    packages=setuptools.find_packages(include=['cliargs', 'cliargs.*']),
    python_requires='>=3.8',
    install_requires=[
        'pyyaml', 'rich', 'rapidfuzz'
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['cliargs=cliargs.main:main'],
    },
    description='Compact schema-string declaration and typed parsing of command-line arguments.',
)
