# dashboard.py
"""Streamlit page for tuning the computer opponent against a scripted player.

Run with ``streamlit run dashboard.py``.
"""
import numpy as np
import streamlit as st
import matplotlib.pyplot as plt

from pong_ai import OpponentController
from pong_config import CFG
from pong_env import PongEnv, simulate_points, tracking_action


@st.cache_data
def run_points(points, paddles, speed_factor, seed):
    return simulate_points(points, paddles, speed_factor, seed)


st.set_page_config(layout="wide", page_title="Pong — Rally Lab")
st.title("Pong — Rally Lab")
st.caption("Autopilot (left) vs computer (right), played headlessly with the game's own simulation.")

st.sidebar.header("Match")
paddles = st.sidebar.radio("Paddles", ["circle", "rect"])
speed_factor = st.sidebar.slider("Speed factor", CFG.min_speed_factor, CFG.max_speed_factor, 1.0, 0.25)
points = st.sidebar.slider("Points to play", 5, 100, 20, 5)
seed = int(st.sidebar.number_input("Seed", min_value=0, value=0, step=1))

stats = run_points(points, paddles, speed_factor, seed)
rallies, outcomes = stats["rallies"], stats["outcomes"]

m1, m2, m3, m4 = st.columns(4)
m1.metric("Autopilot points", int((outcomes > 0).sum()))
m2.metric("Computer points", int((outcomes < 0).sum()))
m3.metric("Mean rally", f"{rallies.mean():.1f} hits")
m4.metric("Top ball speed", f"{stats['ball_speed'].max():.2f}")

left, right = st.columns(2)
with left:
    st.subheader("Rally length")
    fig, ax = plt.subplots()
    ax.hist(rallies, bins=np.arange(rallies.max() + 2) - 0.5)
    ax.set_xlabel("Returns before the point ended"); ax.set_ylabel("Points")
    st.pyplot(fig, clear_figure=True)

    st.subheader("Ball speed")
    fig, ax = plt.subplots()
    ax.plot(stats["ball_speed"], linewidth=0.8)
    ax.axhline(CFG.max_ball_speed * speed_factor, color="red", linestyle="--", label="speed cap")
    ax.set_xlabel("Frame"); ax.set_ylabel("px / frame"); ax.legend()
    st.pyplot(fig, clear_figure=True)

with right:
    st.subheader("Computer difficulty ramp")
    ai = OpponentController(CFG)
    hits = np.arange(0, 41)
    fig, ax = plt.subplots()
    ax.plot(hits, [ai.max_move(h) for h in hits], label="max move / frame")
    ax.plot(hits, [ai.error_scale(h) for h in hits], label="aim error span")
    ax.plot(hits, [100 * ai.lead_factor(h) for h in hits], label="lead factor x100")
    ax.set_xlabel("Hit count"); ax.legend()
    st.pyplot(fig, clear_figure=True)

    st.subheader("Court")
    frames = st.slider("Frames into the first point", 0, 600, 120, 10)
    env = PongEnv(paddles=paddles, seed=seed)
    for _ in range(frames):
        _, _, done, _ = env.step(tracking_action(env))
        if done:
            break
    st.image(env.render_rgb(), channels="RGB")
