from locust import HttpUser, task, between
import random

class PresentationCoachUser(HttpUser):
    wait_time = between(1, 3)
    host = "http://127.0.0.1:8000"  # ✅ Set your backend URL here

    # -------------- Shared Sample Data ------------------

    transcripts = [
        "Today I'm going to tell you about our startup idea focused on sustainable packaging.",
        "Our project is about using AI to streamline financial reporting for small businesses.",
        "In this pitch, I want to talk about the importance of inclusive design in tech products.",
    ]

    def audio_features(self):
        volume_min = round(random.uniform(0.05, 0.3), 2)
        return {
            "pitchVariance": round(random.uniform(0.2, 3.0), 2),
            "volumeMax": round(random.uniform(0.6, 1.0), 2),
            "volumeMin": volume_min,
            "volumeAvg": round(volume_min + 0.3, 2),
            "pauseCount": random.randint(0, 12),
            "pauseAvgDuration": random.randint(200, 1500),
        }

    # -------------- Individual Tasks ---------------------

    @task(3)
    def evaluate_transcript(self):
        data = {"transcript": random.choice(self.transcripts)}
        self.client.post("/api/evaluate", json=data)

    @task(2)
    def evaluate_with_audio(self):
        data = {
            "transcript": random.choice(self.transcripts),
            "audioFeatures": self.audio_features(),
        }
        self.client.post("/api/evaluate", json=data)

    @task(1)
    def health(self):
        self.client.get("/")
