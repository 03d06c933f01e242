"""
可视化基类
"""

import io
import re

import matplotlib
matplotlib.use('Agg')  # 无界面后端
import matplotlib.pyplot as plt

# matplotlib 以 72dpi 输出 SVG, 1pt 即 1px
SVG_DPI = 72


class Visualizer:
    """可视化器基类 (输出 SVG 文本)"""

    def __init__(self, font_size: int = 12):
        self.font_size = font_size
        self._setup_style()

    def _setup_style(self):
        """SVG 输出设置"""
        # 文字保留为 <text>, 不转为路径
        plt.rcParams['svg.fonttype'] = 'none'
        # 固定 id 与元数据, 相同输入得到相同输出
        plt.rcParams['svg.hashsalt'] = 'pct-chart'
        plt.rcParams['font.size'] = self.font_size
        plt.rcParams['font.sans-serif'] = ['DejaVu Sans', 'Arial', 'Helvetica']
        plt.rcParams['font.family'] = 'sans-serif'

    def new_figure(self, width: float, height: float):
        """创建像素尺寸的画布, 坐标轴铺满整个画布且不显示"""
        fig = plt.figure(figsize=(width / SVG_DPI, height / SVG_DPI), dpi=SVG_DPI)
        ax = fig.add_axes((0, 0, 1, 1))
        ax.set_axis_off()
        return fig, ax

    def save(self, fig) -> str:
        """导出 SVG 文本并关闭画布"""
        buf = io.StringIO()
        fig.savefig(buf, format='svg', dpi=SVG_DPI, metadata={'Date': None})
        plt.close(fig)
        return self._to_pixels(buf.getvalue())

    @staticmethod
    def _to_pixels(svg: str) -> str:
        """根元素的 pt 单位改为 px"""
        return re.sub(r'(width|height)="([\d.]+)pt"', r'\1="\2px"', svg, count=2)

    def generate(self, *args, **kwargs):
        """生成可视化（子类实现）"""
        raise NotImplementedError
