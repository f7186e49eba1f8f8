import json
from chartwindow.charts import to_chart_payload
from chartwindow.data.windowing import window_slice

def main():
    labels = ["testing", "array", "indexes"]
    data = [1.0, 1.1, 1.2]
    print(json.dumps(to_chart_payload(window_slice(labels, data, 2)), indent=2))

if __name__ == "__main__":
    main()
