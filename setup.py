from setuptools import setup, find_packages

package_name = 'qos_overrides'

setup(
    name=package_name,
    version='1.0.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    data_files=[
        ('share/ament_index/resource_index/packages',
            ['resource/' + package_name]),
        ('share/' + package_name, ['package.xml']),
    ],
    python_requires='>=3.8',
    install_requires=['setuptools', 'PyYAML>=5.1'],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=True,
    maintainer='Phyto-Arm Team',
    maintainer_email='developer@example.com',
    description='Declare QoS policies of publishers and subscriptions as read-only override parameters',
    license='MIT',
    tests_require=['pytest'],
    entry_points={
        'console_scripts': [],
    },
)
