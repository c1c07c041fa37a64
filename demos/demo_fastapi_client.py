#!/usr/bin/env python3
"""
Prompt Template Builder API Demo

This script demonstrates how to use the Prompt Template Builder service.
It calls every endpoint and prints the results.
"""

import requests
import json
from typing import Dict, Any, Optional


class PromptBuilderClient:
    """Client for interacting with the Prompt Template Builder service"""

    def __init__(self, base_url: str = "http://localhost:8000", timeout: float = 60.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()

    def _post(self, path: str, data: Dict[str, Any]) -> Dict[str, Any]:
        response = self.session.post(f"{self.base_url}{path}", json=data, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def health_check(self) -> Dict[str, Any]:
        """Check if the service is healthy"""
        response = self.session.get(f"{self.base_url}/health", timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def get_catalog(self) -> Dict[str, Any]:
        """Get supported models, task types and tones"""
        response = self.session.get(f"{self.base_url}/api/catalog", timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def analyze_task(self, task_description: str) -> Dict[str, Any]:
        """Get a model recommendation for a task description"""
        return self._post("/api/analyze-task", {"taskDescription": task_description})

    def generate_task_prompt(self, task_description: str, selected_model: str, tone: str) -> Dict[str, Any]:
        """Generate a prompt pair for a described task"""
        return self._post("/api/generate-task-prompt", {
            "taskDescription": task_description,
            "selectedModel": selected_model,
            "tone": tone
        })

    def generate_prompt(self, model: str, task_type: str, tone: str,
                        custom_prompt: Optional[str] = None) -> Dict[str, Any]:
        """Generate a prompt pair for model, task type and tone"""
        data = {"model": model, "taskType": task_type, "tone": tone}
        if custom_prompt:
            data["customPrompt"] = custom_prompt
        return self._post("/api/generate-prompt", data)


def format_json(data: Dict[str, Any]) -> str:
    """Format JSON data for pretty printing"""
    return json.dumps(data, indent=2, default=str)


def print_prompt_pair(result: Dict[str, Any]):
    print(f"  System prompt: {result['systemPrompt'][:120]}...")
    print(f"  User prompt:   {result['userPrompt'][:120]}...")
    print(f"  Formatting tips: {len(result['formattingTips'])}, behavioral notes: {len(result['behavioralNotes'])}")


def demo_api_usage():
    """Demonstrate the Prompt Template Builder API"""
    print("Prompt Template Builder API Demo")
    print("=" * 50)

    client = PromptBuilderClient()

    # 1. Health Check
    print("\n1. 🏥 Health Check")
    print("-" * 20)
    try:
        health = client.health_check()
        print(f"Status: {health['status']}")
        print(f"Completion model: {health['completionModel']}")
        print(f"Credential configured: {health['credentialConfigured']}")
    except requests.exceptions.ConnectionError:
        print("Service is not running. Please start it with: python start_server.py")
        return
    except Exception as e:
        print(f"Health check failed: {e}")
        return

    # 2. Catalog
    print("\n2. 📚 Catalog")
    print("-" * 20)
    try:
        catalog = client.get_catalog()
        print(f"Models: {', '.join(catalog['models'])}")
        print(f"Task types: {', '.join(catalog['taskTypes'])}")
        print(f"Tones: {', '.join(catalog['tones'])}")
    except Exception as e:
        print(f"Catalog retrieval failed: {e}")

    # 3. Task analysis
    print("\n3. 🔍 Task Analysis")
    print("-" * 20)
    tasks = [
        "Prove this mathematical theorem using formal logic",
        "Debug and explain complex Python code",
        "Write engaging social media posts for my coffee shop",
        "Describe what is shown in this photo",
        "Write a quick summary of this article"
    ]
    for task in tasks:
        try:
            recommendation = client.analyze_task(task)
            alternatives = ", ".join(alt['model'] for alt in recommendation['alternatives'])
            print(f"\n{task}")
            print(f"  → {recommendation['recommendedModel']} "
                  f"(confidence {recommendation['confidence']:.2f}, {recommendation['taskComplexity']})")
            print(f"  Alternatives: {alternatives}")
        except Exception as e:
            print(f"  Analysis failed: {e}")

    # 4. Prompt generation
    print("\n4. ✍️  Prompt Generation")
    print("-" * 20)
    if not health['credentialConfigured']:
        print("No API key configured on the server; skipping generation calls")
        return

    try:
        print("\nTemplate (gpt-4o, summarization, formal):")
        print_prompt_pair(client.generate_prompt("gpt-4o", "summarization", "formal"))

        print("\nRewrite (gpt-4.1, code-explanation, technical):")
        print_prompt_pair(client.generate_prompt(
            "gpt-4.1", "code-explanation", "technical",
            custom_prompt="Explain what this function does"
        ))

        print("\nDescribed task (o3, direct):")
        print_prompt_pair(client.generate_task_prompt(
            "Review a commercial lease agreement and flag risky clauses", "o3", "direct"
        ))
    except requests.exceptions.HTTPError as e:
        print(f"Generation failed: {e.response.status_code} {format_json(e.response.json())}")

    print("\nDemo completed!")
    print("\nTo interact with the API manually:")
    print("  • Docs: http://localhost:8000/docs (Swagger UI)")


if __name__ == "__main__":
    demo_api_usage()
