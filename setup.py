from setuptools import setup, find_namespace_packages
import os

current_path = os.path.dirname(os.path.abspath(__file__))
target_path = os.path.join(current_path, "src")


if __name__ == "__main__":
    setup(
        name='heatcompare',
        version='0.1.0',
        description='24 hour heating and hot water comparison of domestic heating systems',
        package_dir={'': 'src'},
        packages=find_namespace_packages(where=target_path, include=['heatcompare*']),
        py_modules=['compare_24h'],
        python_requires='>=3.8',
        install_requires=[
            'numpy',
        ],
        extras_require={
            'test': ['pytest'],
        },
    )
