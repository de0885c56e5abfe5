# ===============================================================
#  web_app.py — Bloc 1 / 4
#  Imports, configuration, état de session
# ===============================================================

import logging

import numpy as np
import pandas as pd
import streamlit as st

# --- Modules internes ---
from feedforward_net.config import DEFAULT_INPUT, DEFAULT_SIZES, NetworkConfig
from feedforward_net.errors import NetworkError
from feedforward_net.logging_config import setup_logging
from feedforward_net.neural_network import Network

logger = logging.getLogger("feedforward_net.web_app")


# ===============================================================
#    CONFIG STREAMLIT
# ===============================================================

st.set_page_config(
    page_title="Feedforward Lab – NN Playground",
    layout="wide"
)

st.title("🧠 Feedforward Lab")
st.caption("Petit labo interactif pour explorer une propagation avant, couche par couche.")


@st.cache_resource
def init_logging():
    config = NetworkConfig.from_env()
    setup_logging(config.log_level)
    return config


base_config = init_logging()


# ===============================================================
#    ÉTAT GLOBAL STREAMLIT
# ===============================================================

if "network" not in st.session_state:
    st.session_state.network = None

if "network_key" not in st.session_state:
    st.session_state.network_key = None

if "draw_count" not in st.session_state:
    st.session_state.draw_count = 0


# ===============================================================
#    UTILITAIRES
# ===============================================================

def parse_sizes(text: str):
    """'6, 3, 3, 1' -> [6, 3, 3, 1] (les erreurs remontent en InvalidTopology via Network)."""
    parts = [p.strip() for p in text.split(",") if p.strip()]
    return [int(p) for p in parts]


def get_network(sizes, seed):
    """
    Réseau courant, reconstruit seulement si la topologie, la graine
    ou le tirage demandé changent (sinon chaque rerun re-tirerait les poids).
    """
    key = (tuple(sizes), seed, st.session_state.draw_count)
    if st.session_state.network_key != key:
        config = NetworkConfig(seed=seed, log_level=base_config.log_level)
        st.session_state.network = Network.from_config(sizes, config)
        st.session_state.network_key = key
    return st.session_state.network


def compute_weight_stats(net: Network):
    weights = np.concatenate([w.grid for w in net.weights])
    return {
        "mean": float(np.mean(weights)),
        "std": float(np.std(weights)),
        "min": float(np.min(weights)),
        "max": float(np.max(weights)),
    }


# ===============================================================
#   web_app.py — Bloc 2 / 4
#   Sidebar, construction du réseau
# ===============================================================

st.sidebar.header("🧱 Architecture")

sizes_text = st.sidebar.text_input(
    "Tailles des couches (entrée → sortie)",
    ", ".join(str(s) for s in DEFAULT_SIZES),
)

use_seed = st.sidebar.checkbox("Graine fixe (poids reproductibles)", value=True)
seed_value = st.sidebar.number_input("Seed", min_value=0, value=42, step=1)
seed = int(seed_value) if use_seed else None

if st.sidebar.button("🎲 Retirer les poids"):
    st.session_state.draw_count += 1

try:
    sizes = parse_sizes(sizes_text)
    net = get_network(sizes, seed)
except (ValueError, NetworkError) as e:
    logger.warning("Topologie refusée: %s", e)
    st.error(f"🚫 Topologie invalide : {e}")
    st.stop()

st.sidebar.markdown("---")
st.sidebar.subheader("🎚️ Entrée")

inputs = []
for i in range(net.sizes[0]):
    default = DEFAULT_INPUT[i] if i < len(DEFAULT_INPUT) else 0.5
    inputs.append(
        st.sidebar.slider(f"x{i}", 0.0, 1.0, float(default), step=0.01, key=f"input_{i}")
    )


# ===============================================================
#   STRUCTURE DES ONGLETS
# ===============================================================

(
    tab_readme,
    tab_forward,
    tab_weights,
) = st.tabs([
    "📖 Readme",
    "✨ Propagation",
    "🧮 Poids",
])


with tab_readme:
    st.subheader("Bienvenue dans le Feedforward Lab 👋")

    st.markdown("""
## 🎯 À quoi sert cette application ?

Elle construit un **réseau de neurones dense** à partir d'une liste de tailles de couches
et évalue **une propagation avant** sur l'entrée choisie dans la barre latérale.

Pour chaque couche :

> a(l+1) = sigmoid( W(l) · a(l) + b(l) )

- les poids `W` et les biais `b` sont tirés uniformément dans [0, 1) à la construction,
- la **sigmoïde** compresse chaque sortie entre 0 et 1,
- les entrées doivent rester dans [0, 1].

Il n'y a pas d'entraînement ici : le but est de voir comment l'information traverse le réseau.
Fixe une graine pour retrouver exactement les mêmes poids d'une session à l'autre.
""")


# ===============================================================
#   web_app.py — Bloc 3 / 4
#   Onglet : ✨ Propagation
# ===============================================================

with tab_forward:
    st.subheader("✨ Propagation avant")

    output = net.feedForward(inputs)

    st.success(f"**Sortie :** `{[round(v, 4) for v in output]}`")

    colA, colB = st.columns(2)

    with colA:
        df_out = pd.DataFrame({
            "neurone": list(range(len(output))),
            "activation": output,
        })
        st.bar_chart(df_out.set_index("neurone"))

    with colB:
        norms = [float(np.linalg.norm(a.values)) for a in net.activations]
        df_norms = pd.DataFrame({
            "layer": list(range(len(norms))),
            "activation_norm": norms,
        })
        st.line_chart(df_norms.set_index("layer"))

    st.markdown("---")
    st.markdown("### Activations par couche")

    cols = st.columns(net.num_layers)
    for i, activation in enumerate(net.activations):
        cols[i].code(str(activation), language=None)


# ===============================================================
#   web_app.py — Bloc 4 / 4
#   Onglet : 🧮 Poids
# ===============================================================

with tab_weights:
    st.subheader("🧮 Analyse des poids")

    if not net.weights:
        st.info("Réseau à une seule couche : aucun poids.")
    else:
        stats = compute_weight_stats(net)
        c1, c2, c3, c4 = st.columns(4)

        c1.metric("Mean", f"{stats['mean']:.4f}")
        c2.metric("Std", f"{stats['std']:.4f}")
        c3.metric("Min", f"{stats['min']:.4f}")
        c4.metric("Max", f"{stats['max']:.4f}")

        for layer, (w, b) in enumerate(zip(net.weights, net.biases)):
            st.markdown("---")
            st.markdown(f"### Couche {layer} → {layer + 1}")

            colW, colB = st.columns([3, 1])
            with colW:
                st.dataframe(pd.DataFrame(w.to_rows()))
                st.code(str(w), language=None)
            with colB:
                st.dataframe(pd.DataFrame({"bias": b.tolist()}))
