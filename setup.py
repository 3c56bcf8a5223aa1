from setuptools import setup, find_packages

setup(
    name="bf16_ops",
    version="0.1.0",
    description="A bfloat16 codec: bit-exact float32 <-> bfloat16 conversion for scalars, arrays and tensors",
    author="BF16Ops Project",
    packages=find_packages(exclude=["tests", "tests.*"]),  # This will find 'bf16_ops' and its sub-packages
    install_requires=[
        "torch>=2.0.0",
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
)
