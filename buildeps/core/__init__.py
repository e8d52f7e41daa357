"""核心模块

拆分说明:
- manifest.py: Cargo.toml / Cargo.lock 解析，提取直接依赖
- orchestrator.py: 逐个依赖调用 cargo build
- pipeline.py: 串联读取与构建，维护运行状态
"""
