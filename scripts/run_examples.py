import os

import numpy as np
import scipy.fft

from pynumchart import (
    AxisUnit,
    ClusterSet,
    FunctionFit,
    PeakFinder,
    configure_logging,
    save,
    show,
    to_chart,
    update_clusters,
    update_function_fit,
    update_peaks,
    update_vector,
)

# --- User configuration dictionary ---
CONFIG = {
    "LOG_LEVEL": "INFO",  # logging level: DEBUG, INFO, SUCCESS, WARNING, ERROR, CRITICAL
    "SHOW_PLOTS": True,  # show each chart in a window; False saves to OUTPUT_DIR instead
    "OUTPUT_DIR": "./charts/",
    "BACKGROUND": "beige",
    "NUM_INTERPOLATED_VALUES": 100,
    # --- curve fitting
    "FIT_START": (0.0, 4.0, 45.0, 5.5),  # 4PL start: lower asymptote, slope, inflection, upper asymptote
    # --- FFT
    "FFT_N": 100,
    "FFT_DT": 0.1,  # seconds
    # --- peak finding
    "PEAK_STEP": 0.1,
    "PEAK_WIDTH": 5,  # Savitzky-Golay window
    "PEAK_DEGREE": 4,  # Savitzky-Golay polynomial degree
    "PEAK_XMIN": 20.0,
    "PEAK_XMAX": 50.0,
    # --- k-means
    "CLUSTERS": 5,
    "CLUSTER_SEED": 1,
    "X_COL": 0,
    "Y_COL": 1,
}

# Evolution of an algal bloom in the Adriatic Sea
ALGAL_DAYS = np.array([11, 15, 18, 23, 26, 31, 39, 44, 54, 64, 74], dtype=float)
ALGAL_SIZE = np.array(
    [0.00476, 0.0105, 0.0207, 0.0619, 0.337, 0.74, 1.7, 2.45, 3.5, 4.5, 5.09]
)

# 30 points in three dimensions around (0.5, 0.5, 0.5), (1.5, 1.5, 1.5) and (2.5, 2.5, 2.5)
CLUSTER_DATA = np.array(
    [
        [0.62731478808400, 0.71654239725005, 0.11461282117064],
        [0.69908013774534, 0.51131144816890, 0.66485556714021],
        [0.39718395379261, 0.77640121193349, 0.36537389168912],
        [0.41362889533818, 0.48934547589850, 0.14004445653473],
        [0.65521294635567, 0.18590445122522, 0.56677280030311],
        [0.83758509883186, 0.70063540514612, 0.82300831429067],
        [0.37160803224266, 0.98270880190626, 0.67394863209536],
        [0.42525315848265, 0.80663774928874, 0.99944730494940],
        [0.59466337145257, 0.70356765500360, 0.96163640714857],
        [0.56573857208571, 0.48496371932457, 0.05886216545559],
        [1.36031117091978, 1.43187338560697, 1.73265064912939],
        [1.54851281373460, 1.63426595631548, 1.42222658611939],
        [1.26176956987179, 1.80302634023193, 1.96136999885631],
        [1.59734484793384, 1.08388100700103, 1.07205923855201],
        [1.04927799659601, 1.94546278791039, 1.55340796803039],
        [1.57105749438466, 1.91594245989412, 1.29198392114244],
        [1.70085723323733, 1.60198742363800, 1.85796351308408],
        [1.96228825871716, 1.25356057873233, 1.33575513868621],
        [1.75051823194427, 1.87345080554039, 1.68020385037051],
        [1.73999304537847, 1.51340070999628, 1.05344442131849],
        [2.35665553727760, 2.67000386489368, 2.90898934903532],
        [2.49830459603553, 2.20087641229516, 2.59624713810572],
        [2.43444053822029, 2.27308816154697, 2.32895530216404],
        [2.56245841710735, 2.62623463865051, 2.47819442572535],
        [2.61662113016546, 2.53685169481751, 2.59717077926034],
        [2.11333998089856, 2.05950405092050, 2.16144875489995],
        [2.89825174061313, 2.08896175947532, 2.82947425087386],
        [2.75455137523865, 2.27130817438170, 2.95612240635488],
        [2.79112319571067, 2.40907231577105, 2.59554799520203],
        [2.81495206793323, 2.47404145037448, 2.02874821321149],
    ]
)


def four_parameter_logistic(x, a, b, c, d):
    """``d + (a - d) / (1 + (x / c)^b)``"""
    return d + (a - d) / (1.0 + (x / c) ** b)


def output(chart, name: str) -> None:
    if CONFIG["SHOW_PLOTS"]:
        show(chart)
    else:
        os.makedirs(CONFIG["OUTPUT_DIR"], exist_ok=True)
        save(chart, os.path.join(CONFIG["OUTPUT_DIR"], f"{name}.png"))


def curve_fitting() -> None:
    fitter = FunctionFit(four_parameter_logistic)
    solution = fitter.fit(ALGAL_DAYS, ALGAL_SIZE, CONFIG["FIT_START"])

    chart = to_chart(
        update_function_fit,
        fitter,
        ALGAL_DAYS,
        ALGAL_SIZE,
        solution,
        CONFIG["NUM_INTERPOLATED_VALUES"],
    )
    chart.titles[0].text = "Algal Bloom in the Adriatic Sea"
    chart.x_axis.title = "Days"
    chart.y_axis.title = "Size (mm2)"
    chart.series[0].label = "Observed"
    chart.series[1].label = "Fitted 4PL"
    chart.background = CONFIG["BACKGROUND"]
    output(chart, "curve_fit")


def fft() -> None:
    n = CONFIG["FFT_N"]
    dt = CONFIG["FFT_DT"]
    t = np.arange(n) * dt
    signal = (
        np.sin(2 * np.pi * t)
        + 2 * np.sin(2 * np.pi * 2 * t)
        + 3 * np.sin(2 * np.pi * 3 * t)
    )

    chart = to_chart(update_vector, signal, AxisUnit(0.0, dt, "Time (s)"))
    chart.titles[0].text = "Signal"
    chart.y_axis.title = "Voltage"
    output(chart, "signal")

    # Frequency resolution of the one-sided spectrum is 1 / (n * dt)
    spectrum = scipy.fft.rfft(signal)
    chart = to_chart(update_vector, spectrum, AxisUnit(0.0, 1.0 / (n * dt), "Frequency (Hz)"))
    chart.titles[0].text = "FFT"
    chart.y_axis.title = "Power"
    output(chart, "fft")


def peak_finding() -> None:
    step = CONFIG["PEAK_STEP"]
    x = 0.01 + step * np.arange(1000)
    y = np.sin(x) / x

    finder = PeakFinder(y, CONFIG["PEAK_WIDTH"], CONFIG["PEAK_DEGREE"], abscissa_interval=step)
    finder.locate_peaks()

    chart = to_chart(update_peaks, finder, CONFIG["PEAK_XMIN"], CONFIG["PEAK_XMAX"])
    output(chart, "peaks")


def kmeans_clustering() -> None:
    clusters = ClusterSet.kmeans(CLUSTER_DATA, CONFIG["CLUSTERS"], seed=CONFIG["CLUSTER_SEED"])
    chart = to_chart(update_clusters, clusters, CLUSTER_DATA, CONFIG["X_COL"], CONFIG["Y_COL"])
    output(chart, "clusters")


def main() -> None:
    """
    Run the curve fitting, FFT, peak finding and clustering examples.
    """
    configure_logging(CONFIG.get("LOG_LEVEL", "INFO"))

    curve_fitting()
    fft()
    peak_finding()
    kmeans_clustering()


if __name__ == "__main__":
    main()
