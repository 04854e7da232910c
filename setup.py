from setuptools import setup
from os import path

here = path.abspath(path.dirname(__file__))

# Get the long description from the README file
with open(path.join(here, 'README.md')) as f:
    long_description = f.read()

if __name__ == '__main__':
    setup(
        name='rose-grammar',
        version='0.1.0',
        description='Leftmost derivations and regularity checks for single character grammars',
        long_description=long_description,
        long_description_content_type='text/markdown',

        license='GNU General Public License (GPL)',

        classifiers=[
            'Development Status :: 3 - Alpha',

            'Intended Audience :: Education',
            'Topic :: Text Processing :: Linguistic',

            'License :: OSI Approved :: GNU General Public License (GPL)',

            'Programming Language :: Python :: 3',
        ],

        keywords='grammar derivation regular grammar rewriting',

        packages=['grammar', 'util'],
        py_modules=['rose'],
        install_requires=['plac'],
        python_requires='>=3.6',

        entry_points={
            'console_scripts': ['rose = rose:cli'],
        },
    )
