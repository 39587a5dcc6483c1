from setuptools import setup

package_name = 'polar_joystick'

setup(
    name=package_name,
    version='0.1.0',
    package_dir={'': 'src'},
    packages=[package_name, f'{package_name}.widgets'],
    install_requires=['setuptools', 'python_qt_binding', 'PyQt5'],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.8',
    zip_safe=True,
    author='Abdelrahman Mahmoud',
    maintainer='Abdelrahman Mahmoud',
    maintainer_email='abdulrahman.mahmoud1995@gmail.com',
    keywords=['joystick', 'touch', 'qt', 'widget', 'teleop'],
    description='On-screen virtual joystick that reports angle and strength while pressed.',
    license='BSD',
    entry_points={
        'console_scripts': [
            'polar_joystick = ' + package_name + '.main:main',
        ],
    },
)
