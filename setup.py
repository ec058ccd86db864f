from setuptools import setup, find_packages
import re

# Read version from exitcalc/__init__.py
with open('exitcalc/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='exitcalc',
    version=version,
    packages=find_packages(include=['exitcalc', 'exitcalc.*']),
    install_requires=[
        'PyYAML>=6.0',
        'click>=8.0',
        'pydantic>=2.5',
        'rich>=13.0',
    ],
    extras_require={
        'mcp': [
            'mcp[cli]>=1.0.0,<2',
        ],
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'exit-calc=exitcalc.cli.__main__:main',
            'exit-calc-mcp=exitcalc.mcp.server:run_server',
        ],
    },
    author='Personal',
    description='Portuguese employment-exit payout comparison (mutual agreement vs termination).',
    python_requires='>=3.10',
)
