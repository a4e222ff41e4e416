from setuptools import find_packages, setup

package_name = 'aim_range_align'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['tests']),
    data_files=[
        ('share/ament_index/resource_index/packages',
            ['resource/' + package_name]),
        ('share/' + package_name, ['package.xml']),
        ('share/' + package_name + '/launch', ['launch/aim_range.launch.py']),
        ('share/' + package_name + '/config', ['config/aim_range.yaml']),
    ],
    install_requires=['setuptools', 'numpy'],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=True,
    maintainer='super',
    maintainer_email='super@example.com',
    description='Vision-guided aim and range alignment for a holonomic drivetrain',
    license='Apache License 2.0',
    tests_require=['pytest'],
    entry_points={
        'console_scripts': [
            'aim_range = aim_range_align.main:main',
        ],
    },
)
