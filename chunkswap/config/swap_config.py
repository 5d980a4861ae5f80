# chunkswap/config/swap_config.py
from pydantic import BaseModel, Field


class SwapConfig(BaseModel):
    """
    SwapConfig

    语义：
      - 输出目录 / 区域文件扩展名
      - 空槽位 offset 写法（默认写当前 sector cursor，兼容旧输出）
    """

    output_dir: str = "output"
    region_ext: str = Field(default="mca", min_length=1)

    # True: 空槽位 location entry 写 0（社区通用约定）
    zero_empty_offsets: bool = False

    instrumentation: bool = True
