from setuptools import setup

with open('version.txt', 'r') as v:
    version = v.readline().strip()

with open('README.md', 'r') as r:
    readme = r.read()

with open('requirements.txt', 'r') as r:
    requirements = list(x.strip() for x in r if x.strip())

setup(name='origami',
      version=version,
      description='origami'
      ' - Semigroups, monoids, reducers & folds for Python.',
      long_description=readme,
      long_description_content_type='text/markdown',

      license='MIT',

      packages=['origami', 'origami.core'],
      install_requires=requirements,
      extras_require=dict(test=['pytest']))
