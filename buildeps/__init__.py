"""buildeps - 按 Cargo.lock 逐个预编译顶层包的直接依赖"""

__version__ = "0.2.0"
