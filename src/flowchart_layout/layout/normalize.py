"""Dummy node insertion for edges that span more than one layer."""

from __future__ import annotations

import logging

from flowchart_layout.config import LayoutStyle
from flowchart_layout.errors import LayoutInvariantError
from flowchart_layout.layout.state import EdgeChain, LayoutState, WorkNode
from flowchart_layout.layout.types import DUMMY_PREFIX

logger = logging.getLogger(__name__)


def insert_dummy_nodes(state: LayoutState, style: LayoutStyle | None = None) -> list[EdgeChain]:
    """Build one chain per edge, inserting a dummy node on every intermediate layer.

    Chains run in increasing rank order, from the edge's ranking source to
    its ranking target. Edges spanning zero or one layer get a two-node
    chain; self-loops get ``[node, node]``. Dummies carry the index of their
    logical edge so label, style and the reversed flag stay on the edge.
    """
    dummy_size = (style or LayoutStyle()).dummy_size
    chains: list[EdgeChain] = []

    for edge in state.edges:
        src = edge.rank_source
        tgt = edge.rank_target
        if edge.is_self_loop:
            chains.append(EdgeChain(edge_index=edge.index, nodes=[src, tgt]))
            continue

        src_layer = state.nodes[src].layer
        tgt_layer = state.nodes[tgt].layer
        if tgt_layer < src_layer:
            raise LayoutInvariantError(
                "normalization",
                "edge target rank must not precede its source rank",
                f"edge {edge.index} runs from layer {src_layer} to layer {tgt_layer}",
            )

        chain_nodes = [src]
        for step, layer in enumerate(range(src_layer + 1, tgt_layer)):
            state.nodes.append(
                WorkNode(
                    id=f"{DUMMY_PREFIX}{edge.index}_{step}",
                    width=dummy_size,
                    height=dummy_size,
                    layer=layer,
                    is_dummy=True,
                    edge_index=edge.index,
                )
            )
            chain_nodes.append(len(state.nodes) - 1)
        chain_nodes.append(tgt)
        chains.append(EdgeChain(edge_index=edge.index, nodes=chain_nodes))

    state.chains = chains
    logger.debug("normalization inserted %d dummy nodes", state.dummy_count)
    return chains
