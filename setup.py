from setuptools import setup, find_packages

setup(name='orbrot',
      version='1.0.0',
      description='Quaternion rotations of vectors, particles and orbital orientations for N-body simulations',
      packages=find_packages(include=['orbrot', 'orbrot.*']),
      python_requires='>=3.11',
      install_requires=['numpy'],
      extras_require={'test': ['pytest']})
