from setuptools import setup

import etw_msi_cleanup.version


# Let's add this later
# long_description = open('README.txt').read()


def load_requirements(fname):
    with open(fname, 'r') as reqfile:
        reqs = reqfile.read()

    return list(
        filter(None, (line.split('#')[0].strip()
                      for line in reqs.strip().splitlines()))
    )


REQUIREMENTS = dict()
REQUIREMENTS['install'] = load_requirements('requirements.txt')
REQUIREMENTS['test'] = load_requirements('requirements-test.txt')


setup_args = dict(
    name='etw_msi_cleanup',
    version=etw_msi_cleanup.version.__version__,
    description='Remove stale ETW Host Service Windows Installer '
                'registrations',
    # long_description = long_description,
    license='Apache License, Version 2.0',
    packages=['etw_msi_cleanup', 'etw_msi_cleanup.scripts'],
    install_requires=REQUIREMENTS['install'],
    extras_require={'test': REQUIREMENTS['test']},
    python_requires='>=3.7',
    entry_points={
        'console_scripts': [
            'etw_msi_cleanup = etw_msi_cleanup.scripts.msi_cleanup_prog:main',
        ]
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved',
        'Operating System :: Microsoft :: Windows',
        'Programming Language :: Python :: 3',
    ]
)

if __name__ == '__main__':
    setup(**setup_args)
