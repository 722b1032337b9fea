#!/usr/bin/env python

from setuptools import setup, find_packages
import typed_headers

setup(name='typed-headers',
      version=typed_headers.__version__,
      description='Typed HTTP header handlers, starting with RFC1864 Content-MD5.',
      long_description=open("README.md").read(),
      long_description_content_type="text/markdown",
      license = "MIT",
      packages=find_packages(exclude=['test']),
      package_dir={'typed_headers': 'typed_headers'},
      scripts=['bin/typed_headers'],
      python_requires=">=3.7",
      install_requires=[
          'markdown >= 2.6.5',
          'markupsafe >= 2.0',
          'typing_extensions >= 3.7'
      ],
      extras_require={
          'dev': [
          'mypy',
          'pytest'
          ]
      },
      classifiers=[
        'Programming Language :: Python :: 3',
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Environment :: Web Environment',
        'Topic :: Internet :: WWW/HTTP',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: MIT License',
      ],
)
