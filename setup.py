from setuptools import find_packages, setup

package_name = 'chain_ik'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['test']),
    install_requires=['setuptools', 'numpy'],
    python_requires='>=3.8',
    zip_safe=True,
    maintainer='yuuki',
    maintainer_email='yuuzena@gmail.com',
    description='FABRIK and CCD inverse kinematics for planar articulated arms',
    license='MIT',
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'chain_ik_demo = ik_demo.ik_demo_node:main',
        ],
    },
)
