import os
from typing import List

from jinja2 import Environment, FileSystemLoader
from tgf_api.services.visualizer_plugin import VisualizerPlugin
from tgf_api.model import Graph, Node

ORDERS = ("bfs", "dfs")
DEFAULT_ORDER = "bfs"


def traversal_nodes(graph: Graph, start: int, order: str = DEFAULT_ORDER,
                    include_unreachable: bool = False) -> List[Node]:
    """
    Walks the graph from ``start`` and returns nodes in visit order.
    Nodes that cannot be reached are appended in graph order when asked for.
    """
    if order == "bfs":
        nodes = graph.breadth_first_order(start)
    elif order == "dfs":
        nodes = graph.depth_first_order(start)
    else:
        raise ValueError(f"Unsupported traversal order: {order}")

    if include_unreachable:
        seen = {node.id for node in nodes}
        nodes.extend(node for node in graph.nodes if node.id not in seen)

    return nodes


class ListingVisualizer(VisualizerPlugin):
    @property
    def plugin_id(self) -> str:
        return "listing"

    @property
    def display_name(self) -> str:
        return "Traversal Listing"

    def render_options_schema(self) -> dict:
        return {
            "start": {
                "type": "int",
                "label": "Start node id (defaults to the first node)",
                "required": False
            },
            "order": {
                "type": "str",
                "label": "Traversal order",
                "required": False,
                "choices": list(ORDERS),
                "default": DEFAULT_ORDER
            },
            "include_unreachable": {
                "type": "bool",
                "label": "List nodes not reachable from start",
                "required": False,
                "default": False
            }
        }

    def render(self, graph: Graph, **options) -> str:
        if not graph.nodes:
            return ""

        start = options.get("start")
        if start is None:
            start = graph.nodes[0].id

        nodes = traversal_nodes(
            graph,
            int(start),
            order=options.get("order") or DEFAULT_ORDER,
            include_unreachable=bool(options.get("include_unreachable", False)),
        )

        # --- Template Rendering ---
        template_path = os.path.join(os.path.dirname(__file__), 'templates')
        env = Environment(loader=FileSystemLoader(template_path), trim_blocks=True)
        template = env.get_template('listing.txt')

        return template.render(nodes=nodes)
