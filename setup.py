from setuptools import setup, find_packages
import os

def get_requirements():
    thelibFolder = os.path.dirname(os.path.realpath(__file__))
    requirementPath = thelibFolder + '/requirements.txt'
    if os.path.isfile(requirementPath):
        with open(requirementPath) as f:
            return [line for line in f.read().splitlines() if line and not line.startswith('#')]
    return []

setup(
    name='prepare-swagger',
    version='0.1.0',
    description='Command-line front-end that drives the prepare_swagger config-to-schema engine',
    license='MIT',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    install_requires=get_requirements(),
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.10',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python :: 3',
    ],
    entry_points={
        'console_scripts': [
            'prepare-swagger=prepare_swagger.cli:main_direct',
            'prepare-swagger-exec=prepare_swagger.cli:main_exec',
        ]
    },
)
