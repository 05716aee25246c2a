from .layout import classify_component, count_components, layout_components
