from __future__ import annotations
import streamlit as st
import pandas as pd
import numpy as np
from typing import List
import matplotlib.pyplot as plt
import networkx as nx
import io
import random

from textcraft.datatypes import RecommendationRequest, Sentence, SUMMARY_LENGTHS, SUMMARY_STYLES, KEYWORD_METHODS, \
    TASK_TYPES, PRIORITY_FACTORS, LANGUAGE_COMPLEXITIES
from textcraft.errors import TextcraftError
from textcraft.features import rank_terms
from textcraft.graphing import similarity_matrix, cluster_members, build_graph
from textcraft.keywords import extract_keywords
from textcraft.logs import setup_logging
from textcraft.recommender import recommend
from textcraft.summarize import summarize_with_details

logger = setup_logging()


def load_text_from_file(uploaded_file) -> str:
    """Plain text only; other formats must be converted by the caller."""
    return uploaded_file.read().decode("utf-8", errors="ignore")


def _preview(text: str, width: int = 80) -> str:
    return text[:width] + "..." if len(text) > width else text


def _weights_frame(weights, column: str, limit: int = 25) -> pd.DataFrame:
    return pd.DataFrame(
        [{"Term": t, column: f"{w:.4f}"} for t, w in rank_terms(weights, limit)]
    )


def draw_cluster_visualization(graph, simM: List[List[float]], clusters: List[int], threshold: float):
    """Similarity heat map next to the sentence graph coloured by cluster."""
    G = nx.Graph()
    for sentence in graph.nodes:
        G.add_node(sentence.idx, cluster=clusters[sentence.idx])
    for edge in graph.edges:
        G.add_edge(edge.i, edge.j, weight=edge.weight)

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(16, 8))

    ax1.set_title("Sentence Similarity (cosine)", fontsize=14, fontweight='bold')
    matrix = np.array(simM)
    im = ax1.imshow(matrix, cmap="Blues", vmin=0.0, vmax=1.0)
    labels = [f"S{i+1}" for i in range(len(graph.nodes))]
    ax1.set_xticks(range(len(labels)))
    ax1.set_xticklabels(labels, rotation=90, fontsize=8)
    ax1.set_yticks(range(len(labels)))
    ax1.set_yticklabels(labels, fontsize=8)
    fig.colorbar(im, ax=ax1, fraction=0.046, pad=0.04)

    ax2.set_title(f"Clusters (edges: similarity > {threshold})", fontsize=14, fontweight='bold')
    if len(G.nodes) > 0:
        pos = nx.spring_layout(G, k=2, iterations=50, seed=42)
        palette = plt.get_cmap("tab10")
        node_colors = [palette(clusters[i] % 10) for i in G.nodes()]
        nx.draw_networkx_nodes(G, pos, ax=ax2, node_color=node_colors, node_size=800, alpha=0.8)
        edges = G.edges(data=True)
        if edges:
            weights = [e[2]['weight'] for e in edges]
            max_weight = max(weights) if weights else 1
            nx.draw_networkx_edges(G, pos, ax=ax2, width=[3 * (w / max_weight) for w in weights],
                                   alpha=0.6, edge_color='gray')
        nx.draw_networkx_labels(G, pos, {i: f"S{i+1}" for i in G.nodes()}, ax=ax2,
                                font_size=10, font_weight='bold')
    ax2.set_aspect('equal')
    ax2.axis('off')

    plt.tight_layout()
    buf = io.BytesIO()
    plt.savefig(buf, format='png', dpi=150, bbox_inches='tight')
    buf.seek(0)
    plt.close()
    return buf


def create_sidebar_controls():
    st.sidebar.header("Operation")
    operation = st.sidebar.radio("Choose a task", ["Summarize", "Extract keywords", "Recommend algorithm"])

    options = {}
    if operation == "Summarize":
        st.sidebar.header("Parameters")
        options["length"] = st.sidebar.selectbox("Summary length", SUMMARY_LENGTHS, index=1)
        options["style"] = st.sidebar.selectbox("Style", SUMMARY_STYLES)
        options["seed"] = st.sidebar.number_input("Paraphrase seed (0 = random)", min_value=0, value=0, step=1)
        st.sidebar.header("Debug Options")
        options["debug"] = st.sidebar.checkbox("Enable Debug Mode", value=True, help="Show detailed pipeline steps")
    elif operation == "Extract keywords":
        st.sidebar.header("Parameters")
        options["count"] = st.sidebar.slider("Keywords", min_value=1, max_value=50, value=10)
        options["method"] = st.sidebar.selectbox("Method", KEYWORD_METHODS)
    return operation, options


def debug_summary(details):
    """Show each summarizer stage of a finished run."""
    st.header("Step 1: Segmentation")
    with st.expander("Sentences and documents", expanded=True):
        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Sentences", len(details.sentences))
        with col2:
            st.metric("IDF Documents", len(details.documents))
        with col3:
            st.metric("Target Sentences", details.target_count)

    st.header("Step 2: Term Weights")
    with st.expander("BM25+, IDF, TF-IDF and phrases", expanded=False):
        col1, col2 = st.columns(2)
        with col1:
            st.subheader("BM25+")
            st.dataframe(_weights_frame(details.bm25, "BM25+"), use_container_width=True)
            st.subheader("Smoothed IDF")
            st.dataframe(_weights_frame(details.idf, "IDF"), use_container_width=True)
        with col2:
            st.subheader("TF-IDF")
            st.dataframe(_weights_frame(details.tfidf, "TF-IDF"), use_container_width=True)
            st.subheader("Repeated phrases")
            repeated = {p: c for p, c in details.phrases.items() if c > 1}
            st.dataframe(pd.DataFrame([{"Phrase": p, "Count": c} for p, c in rank_terms(repeated)]),
                         use_container_width=True)

    st.header("Step 3: Similarity Clusters")
    with st.expander("Cluster details", expanded=True):
        members = cluster_members(details.clusters)
        st.metric("Clusters", len(members))
        st.dataframe(pd.DataFrame([
            {"Cluster": cid, "Sentences": ", ".join(f"S{i+1}" for i in idxs)}
            for cid, idxs in members.items()
        ]), use_container_width=True)
        if len(details.sentences) <= 50:
            try:
                simM = similarity_matrix(details.sentences)
                nodes = [Sentence(idx=i, text=s) for i, s in enumerate(details.sentences)]
                graph = build_graph(nodes, simM, threshold=0.5)
                image = draw_cluster_visualization(graph, simM, details.clusters, 0.5)
                st.image(image, caption="Similarity and clusters", use_column_width=True)
            except Exception as e:
                st.error(f"Could not generate cluster visualization: {str(e)}")
        else:
            st.info(f"Too many sentences to visualize ({len(details.sentences)}).")

    st.header("Step 4: Scoring and Selection")
    with st.expander("Scores", expanded=True):
        selected = set(details.selected)
        st.dataframe(pd.DataFrame([
            {
                "Sentence #": s.index + 1,
                "Cluster": s.cluster,
                "Score": f"{s.score:.4f}",
                "Selected": "yes" if s.index in selected else "no",
                "Text": _preview(s.sentence),
            }
            for s in details.scored
        ]), use_container_width=True)


def run_summary(text: str, options):
    rng = random.Random(options["seed"]) if options["seed"] else None
    details = summarize_with_details(text, length=options["length"], style=options["style"], rng=rng)
    if options["debug"]:
        st.markdown("---")
        st.title("Pipeline Debug Mode")
        debug_summary(details)

    st.markdown("---")
    st.header("Final Summary")
    st.text_area("Generated Summary", details.summary, height=200, disabled=True)
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Original Length", len(text.split()))
    with col2:
        st.metric("Summary Length", len(details.summary.split()))
    with col3:
        compression = len(details.summary.split()) / len(text.split()) if text.split() else 0
        st.metric("Actual Compression", f"{compression:.2%}")


def run_keywords(text: str, options):
    result = extract_keywords(text, count=options["count"], method=options["method"])
    st.header(f"Keywords ({result.method})")
    df = pd.DataFrame([k.to_dict() for k in result.keywords])
    if df.empty:
        st.warning("No keywords found")
        return
    st.dataframe(df, use_container_width=True)
    st.bar_chart(df.set_index("keyword")["score"])


def run_recommendation():
    st.header("Algorithm Recommendation")
    task_type = st.selectbox("Task type", TASK_TYPES)
    text_length = st.number_input("Text length (characters)", min_value=1, value=2000, step=100)
    priority = st.selectbox("Priority", PRIORITY_FACTORS, index=2)
    complexity = st.selectbox("Language complexity", ("",) + LANGUAGE_COMPLEXITIES)
    domain = st.text_input("Content domain (optional)")
    requirements = st.text_input("Special requirements (comma separated)")

    if st.button("Recommend", type="primary"):
        request = RecommendationRequest(
            task_type=task_type,
            text_length=int(text_length),
            priority_factor=priority,
            content_domain=domain or None,
            language_complexity=complexity or None,
            special_requirements=[r.strip() for r in requirements.split(",") if r.strip()],
        )
        result = recommend(request)
        st.success(f"Recommended: {result.recommended_algorithm} (confidence {result.confidence:.0%})")
        st.write(result.explanation)
        st.subheader("Suggested parameters")
        st.json(result.suggested_parameters)
        if result.alternative_algorithms:
            st.subheader("Alternatives")
            st.dataframe(pd.DataFrame([
                {"Algorithm": a.name, "Score": f"{a.score:.2f}", "Strengths": ", ".join(a.strengths)}
                for a in result.alternative_algorithms
            ]), use_container_width=True)


def main():
    st.title("Textcraft")
    st.write("Extractive summaries, keyword extraction and algorithm recommendations")

    operation, options = create_sidebar_controls()

    try:
        if operation == "Recommend algorithm":
            run_recommendation()
            return

        uploaded_file = st.file_uploader("Choose a text file", type=['txt'])
        text = load_text_from_file(uploaded_file) if uploaded_file is not None else ""
        text = st.text_area("Text", text, height=250)

        if st.button("Run", type="primary"):
            with st.spinner("Processing..."):
                if operation == "Summarize":
                    run_summary(text, options)
                else:
                    run_keywords(text, options)
    except TextcraftError as e:
        logger.warning("Request rejected: %s", e)
        st.error(str(e))


if __name__ == "__main__":
    main()
