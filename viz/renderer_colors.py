# viz/renderer_colors.py
BG = (0, 0, 0)
HEAD = (0, 255, 0)
BODY = (0, 200, 0)
FOOD = (255, 0, 0)
TEXT = (255, 255, 255)
